"""Core building blocks of openloadpy."""
