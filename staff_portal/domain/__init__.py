"""Domain packages: each exposes a repository, a service and a router."""
