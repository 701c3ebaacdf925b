"""LuaCSS command-line interface."""
