"""
HubInvestments Shared Package

Code shared between the gRPC edge and its peers:
- generated: protocol buffer messages and gRPC stubs
- clients: outbound gRPC clients (Auth, Order, Position, User)
- utils: logging and metrics

Architecture rule: peers reach the edge only through gRPC; they never
import server-side modules.
"""

__version__ = "0.1.0"
