"""End-to-end and API test suite for the conduit (RealWorld) demo app."""

__version__ = "1.0.0"
