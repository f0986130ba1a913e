"""models/ — Wire records for analysis submissions."""
