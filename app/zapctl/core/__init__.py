"""Core orchestration, configuration and reporting for zapctl."""
