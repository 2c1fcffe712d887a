"""Zero Hunger food donation marketplace."""
