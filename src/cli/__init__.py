"""Command-line interface for the social battery tracker."""
