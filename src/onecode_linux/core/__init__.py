"""Core services: settings backups, git, build, packaging and workflows."""
