

class StatueDashboardError(Exception):
    """Base exception for all statue_dashboard errors"""
    pass

class ConfigError(StatueDashboardError):
    """Invalid or unreadable global.json"""
    pass

class DatasetError(StatueDashboardError):
    """
    Static material/workflow tables break an invariant:
    duplicate categories or stages, negative costs or durations
    """
    pass

class ReentrantUpdateError(StatueDashboardError):
    """set_filter was called from a consumer while the controller was recomputing"""
    pass
