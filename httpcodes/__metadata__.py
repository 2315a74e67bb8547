version = '0.3.0'
homepage = 'https://github.com/httpcodes/httpcodes'
