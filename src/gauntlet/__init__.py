"""Personal task prioritization: score tasks with a questionnaire, work on the top one."""

__version__ = "0.1.0"
