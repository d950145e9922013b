"""
Router de eventos webhook (issues, PRs, pushes, comentarios).
"""
