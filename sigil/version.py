# sigil/version.py
"""
版本管理模块

通过单一来源管理 sigil 版本号，__init__.py 与打包配置均从这里读取。
"""

__version__: str = "0.2.0"
__license__: str = "MIT"
