"""HTTP surface: app factory, security dependencies and error mapping."""
