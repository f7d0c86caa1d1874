"""learnhub: courses, lessons and per-lesson progress tracking API."""
