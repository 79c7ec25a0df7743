# Puts the project root on sys.path for tests/ (pytest rootdir conftest)
