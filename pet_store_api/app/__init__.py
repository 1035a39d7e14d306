"""
Application package.

``main`` assembles the FastAPI application from the pieces below:

* ``core``: configuration, logging, error types and the pet store.
* ``schemas``: the pydantic model of a pet.
* ``services``: translation between HTTP requests and store calls.
* ``api``: routers and endpoint handlers.

The application object is not imported here so that the command line
entry point can adjust settings before ``main`` builds the app.
"""
