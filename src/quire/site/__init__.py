"""Page templates and static site export."""
