"""gamelink: third-party gaming account linking workflow.

Tracks one provider authorization attempt from selection to terminal
outcome, reconciling the out-of-band OAuth result by polling the user's
connection registry.
"""

__version__ = "0.1.0"
