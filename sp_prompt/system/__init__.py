"""Selection engine: choice model, search, pagination, state machine, rendering."""
