"""
Service layer abstraction.

Each service encapsulates the business rules for one part of the
domain and works on an injected ``DataStore``, so the rules can be
exercised without the HTTP layer.
"""
