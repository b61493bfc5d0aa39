"""
Service Layer - Session Orchestration

Ties SessionState, transcript persistence and the IterationEngine together
for both the interactive UI and the batch loop.
"""
