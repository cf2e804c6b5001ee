# -*- test-case-name: pwbounce.test -*-
# Copyright (c) 2026. See LICENSE for details.

"""
Tests for L{pwbounce}.
"""

from hypothesis import HealthCheck, settings


settings.register_profile(
    "patience",
    settings(
        deadline=None,
        suppress_health_check=[HealthCheck.too_slow],
    ),
)
settings.load_profile("patience")
