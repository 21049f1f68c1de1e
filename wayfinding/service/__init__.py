from .path_planning_service import PathPlanningService

__all__ = ['PathPlanningService']
