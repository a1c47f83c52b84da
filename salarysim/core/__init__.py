"""Core building blocks shared by every salarysim layer."""
