"""
Docuflow Script Tests

This package contains tests for the operator scripts:
- deploy/: Edge Function deployment, secrets and git remote setup
- migrations/: Running and printing SQL migrations
- testing/: Edge Function smoke tests
"""
