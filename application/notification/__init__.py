"""分拣通知应用层"""
