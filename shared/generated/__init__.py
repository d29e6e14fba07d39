"""Protocol buffer messages and gRPC stubs for HubInvestments services.

Generated from ``proto/hubinvest/*.proto`` by ``scripts/generate_proto.sh``.
"""
