"""Click commands for the deptree CLI."""
