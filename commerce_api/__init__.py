"""Commerce API: identity and credential validation for a commerce backend."""
