"""Click commands of the workbench CLI."""
