"""Workflow orchestration on top of the domain and runtime packages."""
