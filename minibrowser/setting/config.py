class Config:
    # skip a malformed stylesheet rule instead of failing the whole sheet
    recover_css = False
    log_level = "WARNING"
