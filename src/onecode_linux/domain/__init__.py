"""Domain types and pure logic without IO dependencies."""
