from .navigator import Navigator, SETUP_ROUTE
from .intake_workflow import IntakeWorkflow
from .intake_surface import IntakeSurface, IntakeOutcome, IntakePhase

__all__ = ["Navigator", "SETUP_ROUTE", "IntakeWorkflow", "IntakeSurface", "IntakeOutcome", "IntakePhase"]
