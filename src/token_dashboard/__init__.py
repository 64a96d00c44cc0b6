"""Token dashboard backend: mock token catalog and in-memory portfolios over GraphQL."""
