"""Test configuration for torchpoly tests."""

import hypothesis

# The first torch call in a process can take longer than hypothesis's
# default 200 ms deadline.
hypothesis.settings.register_profile("torchpoly", deadline=None)
hypothesis.settings.load_profile("torchpoly")
