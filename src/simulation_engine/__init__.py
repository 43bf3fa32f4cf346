from src.simulation_engine.cpu_drafter import CPUDrafter
from src.simulation_engine.models import CandidateScore

__all__ = ["CPUDrafter", "CandidateScore"]
