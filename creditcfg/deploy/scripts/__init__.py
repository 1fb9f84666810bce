"""One deploy-config script per shipped market.

Run with ``python -m creditcfg.deploy.scripts.<market>``; each prints the
human-readable summary to stderr and the deploy config to stdout.
"""
