"""视图层(MethodView)."""
