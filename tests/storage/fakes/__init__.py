"""Test fakes for the store boundary."""
from .fake_attribute_store import FakeAttributeStore

__all__ = ["FakeAttributeStore"]
