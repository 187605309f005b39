# censor/engine/__init__.py

"""Engine package providing the blacklist store, matcher, tokenizer and
redactor behind CensorEngine.
"""
