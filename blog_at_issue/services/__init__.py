"""Services: event gate, target resolution, git, content processor, sync."""
