"""Infrastructure layer: C# front end, caching, config files, logging."""
