"""One subpackage per design pattern, each with contracts, implementation and a scenario."""
