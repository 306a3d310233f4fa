"""
Load-test steps for the webhook subscription API.

Modules:
- config: Environment configuration and validation
- logging_setup: Console/file logging for CLI runs
- schemas: Subscription request and response models
- api_client: Authenticated HTTP client with request log and checks
- subscriptions: Subscription creation step
- main: Command line runner
"""
