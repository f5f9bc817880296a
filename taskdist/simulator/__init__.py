from taskdist.simulator.generator import ScenarioGenerator

__all__ = ["ScenarioGenerator"]
