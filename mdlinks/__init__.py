"""mdlinks: resolve Markdown link targets to project files, GitHub style."""
