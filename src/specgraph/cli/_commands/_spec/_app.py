"""Spec command app definition."""

from cyclopts import App

app = App(
    name="spec",
    help="Check and maintain relationships between specifications",
    help_on_error=True,
)
