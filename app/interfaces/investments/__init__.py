"""HTTP interface for the investments bounded context."""
