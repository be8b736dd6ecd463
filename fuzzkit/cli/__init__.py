"""Command-line entrypoint for api-fuzzkit."""
