"""Application services that run the domain rules over user records."""
