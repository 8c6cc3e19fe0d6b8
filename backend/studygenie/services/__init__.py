"""
Services - analysis, upload orchestration and infrastructure adapters
"""
