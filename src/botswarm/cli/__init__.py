"""Command-line interface for botswarm.

Structure:
- app.py: typer application and the ``run_swarm`` coroutine
- __main__.py: ``python -m botswarm.cli`` entry point
"""
