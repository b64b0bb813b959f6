# analyze_tvlog/analyzers/__init__.py
