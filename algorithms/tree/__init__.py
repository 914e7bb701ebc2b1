"""
Binary search trees.  Insert / delete run synchronously per user action
and hand back the (possibly new) root; traversals produce node-id orders
for the traversal player.
"""
