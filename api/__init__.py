"""HTTP dispatcher for the demo UI and its JSON endpoints."""
