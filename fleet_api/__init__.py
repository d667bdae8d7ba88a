"""Fleet API: vehicles, drivers, brands and usage records over HTTP."""
