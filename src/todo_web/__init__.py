"""
Todo Web package.

A server-rendered todo page backed by a pluggable store. Build an app with
``create_app`` or serve one with uvicorn:

    todo-web
    uvicorn --factory src.todo_web.main:create_app
"""
