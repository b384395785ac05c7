"""ViewModel package for form state, picker sheets, and the subscription list.

Call context:
    ``subtrack/web_ui/runtime.py`` imports concrete viewmodels from this
    package to bind page callbacks to state transitions.

Dependencies:
    Modules in this package depend on domain types and small formatting
    helpers only. Rendering stays in ``subtrack.web_ui``.

Responsibilities:
    - Hold draft fields and commit them into the ``SubscriptionStore``.
    - Track picker highlights separately from committed values.
    - Turn store snapshots into view-facing rows.
"""
