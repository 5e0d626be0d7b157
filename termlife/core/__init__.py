"""Grid, rules and tick loop."""
