# analyze_tvlog/config/__init__.py
