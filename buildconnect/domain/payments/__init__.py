"""Payment domain - checkout orders"""
