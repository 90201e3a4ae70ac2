#!/usr/bin/env python3
"""Start the resume API with uvicorn."""

import uvicorn

from resume_builder.core.config import settings


if __name__ == "__main__":
    uvicorn.run("resume_builder.main:app", host=settings.HOST, port=settings.PORT)
