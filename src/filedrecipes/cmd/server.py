import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI

from filedrecipes.config import Settings
from filedrecipes.lib.errors import LoadError
from filedrecipes.lib.repository import RecipeRepository
from filedrecipes.web.routes import router

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = Settings() if settings is None else settings
    app = FastAPI(title="FiledRecipes API")

    repository = RecipeRepository(settings.recipes_path)
    if repository.path.exists():
        try:
            repository.load()
        except LoadError as exc:
            logger.warning("Starting with no recipes: %s", exc)
    else:
        logger.info("No recipe file at %s, starting empty", repository.path)
    repository.subscribe(
        lambda: logger.debug("Recipes changed, %d in memory", len(repository))
    )

    app.state.settings = settings
    app.state.repository = repository
    app.include_router(router)

    return app


def main():
    settings = Settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "filedrecipes.cmd.server:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    main()
