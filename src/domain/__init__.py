"""Domain layer - Pure business logic.

Entities, enums, protocols (ports) and declarative validation rules.
The domain layer has NO dependencies on any framework or infrastructure.

Structure:
- entities/: Domain entities (identity, permission requests, log entries)
- enums/: Role and log-level enumerations
- protocols/: Capability interfaces implemented by infrastructure
- validators/: Predicate + message rule chains
"""
