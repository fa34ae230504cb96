"""
govstatus - government uptime timeline.

Projects a fixed table of historical government incidents onto a monthly
severity grid and derives an uptime percentage from full-outage incidents.
"""

__version__ = "0.1.0"
