"""Round-robin CPU scheduling simulation with jittered time quanta."""

from .errors import EmptyQueue, InvalidInterval, SchedError
from .thread import Thread, UnitSnapshot, WorkUnit
from .scheduler import DispatchRecord, Scheduler, print_dispatch
from .round_robin import RoundRobinScheduler
from .simulator import Simulation, SimulationConfig, SimulationResult
from . import jitter
from . import workload
from . import metrics

__all__ = [
	"SchedError",
	"InvalidInterval",
	"EmptyQueue",
	"Thread",
	"WorkUnit",
	"UnitSnapshot",
	"DispatchRecord",
	"Scheduler",
	"print_dispatch",
	"RoundRobinScheduler",
	"Simulation",
	"SimulationConfig",
	"SimulationResult",
	"jitter",
	"workload",
	"metrics",
]
