"""Quiz infrastructure: session store, schemas, routers."""
