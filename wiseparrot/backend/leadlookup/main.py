from .entrypoints.fastapi_app import create_app

# uvicorn leadlookup.main:app
app = create_app()
