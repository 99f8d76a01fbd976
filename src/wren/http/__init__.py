"""HTTP primitives — request parsing, cookies, query strings, responses."""
