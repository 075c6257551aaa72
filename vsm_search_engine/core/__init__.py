from .main import main, SearchConsole, CommandResult, build_search_engine
from .server import app

__all__ = ['main', 'SearchConsole', 'CommandResult', 'build_search_engine', 'app']
