"""HTTP API for the chart front end."""
