"""Template management, info display and interactive chat helpers."""