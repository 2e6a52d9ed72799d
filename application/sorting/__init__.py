"""邮件分拣应用层"""
