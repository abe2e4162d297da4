"""Base service class for domain services.

Provides a base class that domain services should inherit from.
"""


class Service:
    """Base service for domain business logic.

    This class serves as a marker base class for all domain services,
    enabling consistent patterns across the codebase.

    Usage with FastAPI (automatic dependency injection):
        ```python
        from typing import Annotated
        from fastapi import Depends

        class EmployeeAuthService(Service):
            def __init__(
                self,
                employee_repo: Annotated[EmployeeRepository, Depends()],
                token_service: Annotated[TokenService, Depends(get_token_service)],
            ) -> None:
                self._employee_repo = employee_repo
                self._token_service = token_service

        @router.post("/login")
        async def login(service: Annotated[EmployeeAuthService, Depends()]):
            return await service.login(request)
        ```

    Usage outside a request (manual instantiation):
        ```python
        async with AsyncSessionLocal() as session:
            service = EmployeeAuthService(EmployeeRepository(session), get_token_service())
        ```
    """

    pass
