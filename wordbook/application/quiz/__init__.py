"""Quiz application module: session store port and quiz use case."""
