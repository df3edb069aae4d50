"""Pure view-state machines. Handlers return the next state and commands; they never do I/O."""
