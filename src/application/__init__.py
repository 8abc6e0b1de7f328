"""Application layer - Use cases and orchestration.

This layer contains the application's use cases following the CQRS pattern:
- Commands: Write operations that change weapons or users
- Queries: Read operations that fetch data

Structure:
- commands/: Command dataclasses and handlers (write operations)
- queries/: Query dataclasses and handlers (read operations)
- cqrs/: Handler registry and dispatcher
- dtos/: Result objects returned by handlers
- errors/: ApplicationError and its codes

The application layer orchestrates domain logic but contains no business rules.
"""
