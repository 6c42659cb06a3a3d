"""Fleet private-IP refresh and parallel SSH check."""
