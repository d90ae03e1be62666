"""
Test suites package.

  - ui_testing: async Playwright login scenarios, page objects and framework
  - unit: browser-free tests of the framework and runner

Credentials are never stored in the repository; see `.env.example`.
"""
