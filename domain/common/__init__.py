"""领域层公共基础设施"""
