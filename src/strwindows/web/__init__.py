"""HTTP interface for strwindows."""
