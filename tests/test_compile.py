

def test_compile():
    import tranmerc.arc
    import tranmerc.batch
    import tranmerc.parameters
    import tranmerc.projection
    import tranmerc.status
    import tranmerc.transverse_mercator
    import tranmerc.utils.functions
    import tranmerc.utils.logging
