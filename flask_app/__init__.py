"""Flask web front end for chartgen."""
