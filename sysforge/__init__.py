"""Models of a framed binary protocol, paging and scheduling, a metrics monitor and a stack VM."""

__version__ = "0.1.0"