import pytest


def pytest_configure(config):
    config.addinivalue_line('markers', 'integration: hits the live athletic.net site')
