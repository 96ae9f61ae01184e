"""ngstandards - create Angular projects with custom standards and configurations."""
