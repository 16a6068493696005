default_address = 'localhost:10080'
connection_scheme = 'http'
unspecified_address = '0.0.0.0'
link_local_prefix = '169.'
