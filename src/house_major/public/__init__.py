"""Controllers behind the public website's interactive sections."""
